from pydantic import BaseModel, Field
from typing import List, Optional


class PatternSummary(BaseModel):
    number: int
    name: str
    category: str
    summary: str
    has_demo: bool


class RelationModel(BaseModel):
    kind: str
    target: str
    label: str = ""
    argument: str = ""


class RoleModel(BaseModel):
    identifier: str
    kind: str
    description: Optional[str] = None
    relations: List[RelationModel] = Field(default_factory=list)
    actions: List[str] = Field(default_factory=list)
    refuses: List[str] = Field(default_factory=list)
    refusal: str = ""


class PatternDetail(PatternSummary):
    explanation: str
    roles: List[RoleModel]


class DiagramResponse(BaseModel):
    type: str
    source: str


class DemoResponse(BaseModel):
    entry_name: str
    output_lines: List[str]
