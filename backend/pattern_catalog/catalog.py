# backend/pattern_catalog/catalog.py
"""
Pattern Catalog - The twenty classic design patterns

Definitions only: the registry numbers them in list order, validates
them and renders their diagrams.
"""

from pattern_catalog.models import (
    PatternCategory,
    PatternEntry,
    Role,
    RoleKind,
    calls,
    composes,
    extends,
    has_a,
    implements,
)

INTERFACE = RoleKind.INTERFACE
ABSTRACT = RoleKind.ABSTRACT_CLASS
CONCRETE = RoleKind.CONCRETE_CLASS


# ============================================================
# CREATIONAL PATTERNS
# ============================================================

SINGLETON = PatternEntry(
    name="Singleton",
    category=PatternCategory.CREATIONAL,
    summary="Ensure a class has only one instance and provide a global point of access to it.",
    explanation=(
        "The class hides its constructor and keeps its single instance in a static field. "
        "Callers obtain the instance through a static accessor, which creates it on first use."
    ),
    roles=[
        Role(
            identifier="SingletonClass",
            kind=CONCRETE,
            relations=[has_a("SingletonClass")],
            description="Singleton",
        ),
    ],
)


FACTORY_METHOD = PatternEntry(
    name="Factory Method",
    category=PatternCategory.CREATIONAL,
    summary="Define an interface for creating an object, but let subclasses decide which class to instantiate.",
    explanation=(
        "The creator declares the factory method and works only with the product interface. "
        "Each concrete creator overrides the factory method to return its own product, so "
        "adding an archive format means adding a creator, not editing the client."
    ),
    roles=[
        Role(identifier="Archiver", kind=INTERFACE, description="Product"),
        Role(
            identifier="ArchiverCreator",
            kind=ABSTRACT,
            relations=[has_a("Archiver")],
            description="Creator",
        ),
        Role(
            identifier="ZipArchiver",
            kind=CONCRETE,
            relations=[implements("Archiver")],
            actions=["Zip Archiver"],
            description="ConcreteProduct",
        ),
        Role(
            identifier="RarArchiver",
            kind=CONCRETE,
            relations=[implements("Archiver")],
            actions=["Rar archiver"],
            description="ConcreteProduct",
        ),
        Role(
            identifier="ZipArchiverCreator",
            kind=CONCRETE,
            relations=[extends("ArchiverCreator"), calls("ZipArchiver", "archive(directory)")],
            description="ConcreteCreator",
        ),
        Role(
            identifier="RarArchiverCreator",
            kind=CONCRETE,
            relations=[extends("ArchiverCreator"), calls("RarArchiver", "archive(directory)")],
            description="ConcreteCreator",
        ),
    ],
)


ABSTRACT_FACTORY = PatternEntry(
    name="Abstract Factory",
    category=PatternCategory.CREATIONAL,
    summary="Provide an interface for creating families of related objects without specifying their concrete classes.",
    explanation=(
        "A squadron factory creates a whole family of units: mage, archer and warrior. "
        "Swapping the concrete factory swaps the entire family at once, and the client "
        "never names a concrete unit class."
    ),
    roles=[
        Role(identifier="SquadronFactory", kind=ABSTRACT, description="AbstractFactory"),
        Role(identifier="Mage", kind=INTERFACE, description="AbstractProductA"),
        Role(identifier="Archer", kind=INTERFACE, description="AbstractProductB"),
        Role(identifier="Warrior", kind=INTERFACE, description="AbstractProductC"),
        Role(
            identifier="ElfSquadronFactory",
            kind=CONCRETE,
            relations=[
                extends("SquadronFactory"),
                calls("ElfMage", "createMage()"),
                calls("ElfArcher", "createArcher()"),
                calls("ElfWarrior", "createWarrior()"),
            ],
            description="ConcreteFactory",
        ),
        Role(identifier="ElfMage", kind=CONCRETE, relations=[implements("Mage")], actions=["Elf mage created"]),
        Role(identifier="ElfArcher", kind=CONCRETE, relations=[implements("Archer")], actions=["Elf archer created"]),
        Role(identifier="ElfWarrior", kind=CONCRETE, relations=[implements("Warrior")], actions=["Elf warrior created"]),
    ],
)


BUILDER = PatternEntry(
    name="Builder",
    category=PatternCategory.CREATIONAL,
    summary="Separate the construction of a complex object from its representation.",
    explanation=(
        "The director knows the order of construction steps but not how each step is done. "
        "A concrete builder implements the steps and assembles the product, so the same "
        "construction process can create different representations."
    ),
    roles=[
        Role(
            identifier="Director",
            kind=CONCRETE,
            relations=[has_a("Builder"), calls("Builder", "buildHouse()")],
            description="Director",
        ),
        Role(identifier="Builder", kind=INTERFACE, description="Builder"),
        Role(
            identifier="HouseBuilder",
            kind=CONCRETE,
            relations=[implements("Builder"), composes("House"), calls("House", "getResult()")],
            actions=["Building walls, roof and rooms"],
            description="ConcreteBuilder",
        ),
        Role(identifier="House", kind=CONCRETE, actions=["House assembled"], description="Product"),
    ],
)


PROTOTYPE = PatternEntry(
    name="Prototype",
    category=PatternCategory.CREATIONAL,
    summary="Create new objects by copying a prototypical instance.",
    explanation=(
        "Objects that know how to clone themselves are registered in a cache. "
        "Clients ask the cache for a copy instead of calling constructors, which keeps "
        "expensive initialisation out of the hot path."
    ),
    roles=[
        Role(identifier="Prototype", kind=INTERFACE, description="Prototype"),
        Role(identifier="Circle", kind=CONCRETE, relations=[implements("Prototype")], description="ConcretePrototype"),
        Role(identifier="Rectangle", kind=CONCRETE, relations=[implements("Prototype")], description="ConcretePrototype"),
        Role(identifier="ShapeCache", kind=CONCRETE, relations=[has_a("Prototype")], description="Client"),
    ],
)


# ============================================================
# STRUCTURAL PATTERNS
# ============================================================

ADAPTER = PatternEntry(
    name="Adapter",
    category=PatternCategory.STRUCTURAL,
    summary="Convert the interface of a class into another interface clients expect.",
    explanation=(
        "The adapter implements the interface the client already uses and forwards each "
        "request to the adaptee in the adaptee's own terms. Neither the client nor the "
        "adaptee has to change."
    ),
    roles=[
        Role(
            identifier="Client",
            kind=CONCRETE,
            relations=[calls("UsbPort", "chargeViaUsb()")],
            description="Client",
        ),
        Role(identifier="UsbPort", kind=INTERFACE, description="Target"),
        Role(
            identifier="LightningToUsbAdapter",
            kind=CONCRETE,
            relations=[
                implements("UsbPort"),
                has_a("LightningConnector"),
                calls("LightningConnector", "chargeViaLightning()"),
            ],
            description="Adapter",
        ),
        Role(
            identifier="LightningConnector",
            kind=CONCRETE,
            actions=["Charging through the Lightning connector"],
            description="Adaptee",
        ),
    ],
)


DECORATOR = PatternEntry(
    name="Decorator",
    category=PatternCategory.STRUCTURAL,
    summary="Attach additional responsibilities to an object dynamically.",
    explanation=(
        "A decorator implements the same interface as the object it wraps, does its own "
        "work and delegates to the wrapped object. Decorators stack, giving a flexible "
        "alternative to subclassing for extending behaviour."
    ),
    roles=[
        Role(identifier="Notifier", kind=INTERFACE, description="Component"),
        Role(
            identifier="App",
            kind=CONCRETE,
            relations=[calls("SmsDecorator", "send(message)")],
            description="Client",
        ),
        Role(
            identifier="EmailNotifier",
            kind=CONCRETE,
            relations=[implements("Notifier")],
            actions=["Email sent"],
            description="ConcreteComponent",
        ),
        Role(
            identifier="NotifierDecorator",
            kind=ABSTRACT,
            relations=[implements("Notifier"), has_a("Notifier")],
            description="Decorator",
        ),
        Role(
            identifier="SmsDecorator",
            kind=CONCRETE,
            relations=[extends("NotifierDecorator"), calls("Notifier", "send(message)")],
            actions=["SMS sent"],
            description="ConcreteDecorator",
        ),
    ],
)


FACADE = PatternEntry(
    name="Facade",
    category=PatternCategory.STRUCTURAL,
    summary="Provide a unified interface to a set of interfaces in a subsystem.",
    explanation=(
        "The travel facade hides the flight and hotel booking subsystems behind one "
        "method. Clients search for a trip in a single call while the subsystems stay "
        "available for callers that need finer control."
    ),
    roles=[
        Role(
            identifier="Client",
            kind=CONCRETE,
            relations=[calls("TravelFacade", "getFlightsAndHotels(from, to)")],
            description="Client",
        ),
        Role(
            identifier="TravelFacade",
            kind=CONCRETE,
            relations=[
                has_a("FlightBooker"),
                has_a("HotelBooker"),
                calls("FlightBooker", "getFlightsFor(from, to)"),
                calls("HotelBooker", "getHotelsFor(from, to)"),
            ],
            description="Facade",
        ),
        Role(
            identifier="FlightBooker",
            kind=CONCRETE,
            actions=["Returns flights available in the date range"],
            description="Subsystem",
        ),
        Role(
            identifier="HotelBooker",
            kind=CONCRETE,
            actions=["Returns hotels available in the date range"],
            description="Subsystem",
        ),
    ],
)


COMPOSITE = PatternEntry(
    name="Composite",
    category=PatternCategory.STRUCTURAL,
    summary="Compose objects into tree structures and treat individual objects and compositions uniformly.",
    explanation=(
        "Leaves and composites share one component interface. A composite stores child "
        "components and forwards operations to them, so clients can walk a whole tree "
        "without checking node types."
    ),
    roles=[
        Role(identifier="Graphic", kind=INTERFACE, description="Component"),
        Role(
            identifier="Ellipse",
            kind=CONCRETE,
            relations=[implements("Graphic")],
            actions=["Ellipse"],
            description="Leaf",
        ),
        Role(
            identifier="CompositeGraphic",
            kind=CONCRETE,
            relations=[implements("Graphic"), composes("Graphic"), calls("Graphic", "print()")],
            actions=["Printing child graphics"],
            description="Composite",
        ),
        Role(
            identifier="Client",
            kind=CONCRETE,
            relations=[calls("CompositeGraphic", "print()")],
            description="Client",
        ),
    ],
)


PROXY = PatternEntry(
    name="Proxy",
    category=PatternCategory.STRUCTURAL,
    summary="Provide a surrogate or placeholder for another object to control access to it.",
    explanation=(
        "The proxy implements the same interface as the real subject and holds a "
        "reference to it. Here it checks the requested host against a list of banned "
        "sites before letting the real connection through, and refuses banned hosts."
    ),
    roles=[
        Role(identifier="Internet", kind=INTERFACE, description="Subject"),
        Role(
            identifier="ProxyInternet",
            kind=CONCRETE,
            relations=[
                implements("Internet"),
                has_a("DefaultInternet"),
                calls("DefaultInternet", "connectToHost(url)"),
            ],
            actions=["Checking {arg} against banned sites"],
            refuses=["facebook.com"],
            refusal="Access Denied to {arg}",
            description="Proxy",
        ),
        Role(
            identifier="DefaultInternet",
            kind=CONCRETE,
            relations=[implements("Internet")],
            actions=["Connecting to {arg}"],
            description="RealSubject",
        ),
        Role(
            identifier="Demo",
            kind=CONCRETE,
            relations=[
                calls("Internet", "connectToHost(it-bulls.com)", argument="it-bulls.com"),
                calls("Internet", "connectToHost(facebook.com)", argument="facebook.com"),
            ],
            description="Client",
        ),
    ],
)


# ============================================================
# BEHAVIORAL PATTERNS
# ============================================================

CHAIN_OF_RESPONSIBILITY = PatternEntry(
    name="Chain of Responsibility",
    category=PatternCategory.BEHAVIORAL,
    summary="Pass a request along a chain of handlers until one of them handles it.",
    explanation=(
        "Each handler keeps a reference to its successor. A handler either processes the "
        "request or forwards it, so senders are decoupled from the receiver that finally "
        "deals with it."
    ),
    roles=[
        Role(identifier="Handler", kind=ABSTRACT, relations=[has_a("Handler")], description="Handler"),
        Role(
            identifier="Client",
            kind=CONCRETE,
            relations=[calls("AuthHandler", "handle(request)")],
            description="Client",
        ),
        Role(
            identifier="AuthHandler",
            kind=CONCRETE,
            relations=[extends("Handler"), calls("LoggingHandler", "handle(request)")],
            actions=["Request authenticated, passing on"],
            description="ConcreteHandler",
        ),
        Role(
            identifier="LoggingHandler",
            kind=CONCRETE,
            relations=[extends("Handler"), calls("ResponseHandler", "handle(request)")],
            actions=["Request logged, passing on"],
            description="ConcreteHandler",
        ),
        Role(
            identifier="ResponseHandler",
            kind=CONCRETE,
            relations=[extends("Handler")],
            actions=["Request handled"],
            description="ConcreteHandler",
        ),
    ],
)


COMMAND = PatternEntry(
    name="Command",
    category=PatternCategory.BEHAVIORAL,
    summary="Encapsulate a request as an object.",
    explanation=(
        "The invoker only knows the command interface. A concrete command binds an "
        "action to a receiver, so requests can be queued, logged or undone without the "
        "invoker knowing what they do."
    ),
    roles=[
        Role(identifier="Command", kind=INTERFACE, description="Command"),
        Role(
            identifier="RemoteControl",
            kind=CONCRETE,
            relations=[has_a("Command"), calls("Command", "execute()")],
            description="Invoker",
        ),
        Role(
            identifier="SwitchOnCommand",
            kind=CONCRETE,
            relations=[implements("Command"), has_a("Light"), calls("Light", "switchOn()")],
            description="ConcreteCommand",
        ),
        Role(
            identifier="Light",
            kind=CONCRETE,
            actions=["Light is on"],
            description="Receiver",
        ),
    ],
)


ITERATOR = PatternEntry(
    name="Iterator",
    category=PatternCategory.BEHAVIORAL,
    summary="Access the elements of an aggregate sequentially without exposing its representation.",
    explanation=(
        "The aggregate hands out iterator objects that keep the traversal state. "
        "Several traversals can run over the same collection at once, and the collection "
        "may change its internal layout freely."
    ),
    roles=[
        Role(identifier="Aggregate", kind=INTERFACE, description="Aggregate"),
        Role(identifier="Iterator", kind=INTERFACE, description="Iterator"),
        Role(
            identifier="BookShelf",
            kind=CONCRETE,
            relations=[implements("Aggregate")],
            description="ConcreteAggregate",
        ),
        Role(
            identifier="BookShelfIterator",
            kind=CONCRETE,
            relations=[implements("Iterator"), has_a("BookShelf")],
            description="ConcreteIterator",
        ),
    ],
)


MEDIATOR = PatternEntry(
    name="Mediator",
    category=PatternCategory.BEHAVIORAL,
    summary="Define an object that encapsulates how a set of objects interact.",
    explanation=(
        "Colleagues never refer to each other directly. Pressing the button only tells "
        "the mediator, which decides that the power supply and then the fan must be "
        "turned on."
    ),
    roles=[
        Role(identifier="Mediator", kind=INTERFACE, description="Mediator"),
        Role(
            identifier="Button",
            kind=CONCRETE,
            relations=[has_a("Mediator"), calls("Mediator", "press()")],
            description="Colleague",
        ),
        Role(
            identifier="HomeMediator",
            kind=CONCRETE,
            relations=[
                implements("Mediator"),
                has_a("PowerSupplier"),
                has_a("Fan"),
                calls("PowerSupplier", "turnOn()"),
                calls("Fan", "turnOn()"),
            ],
            description="ConcreteMediator",
        ),
        Role(identifier="PowerSupplier", kind=CONCRETE, actions=["Power supply turned on"], description="Colleague"),
        Role(identifier="Fan", kind=CONCRETE, actions=["Fan turned on"], description="Colleague"),
    ],
)


MEMENTO = PatternEntry(
    name="Memento",
    category=PatternCategory.BEHAVIORAL,
    summary="Capture and externalize an object's internal state so it can be restored later.",
    explanation=(
        "The text window saves its state into a memento and can restore from one. "
        "The editor keeps mementos without being able to read them, which preserves "
        "the window's encapsulation."
    ),
    roles=[
        Role(
            identifier="TextWindow",
            kind=CONCRETE,
            relations=[has_a("TextWindowState")],
            description="Originator",
        ),
        Role(identifier="TextWindowState", kind=CONCRETE, description="Memento"),
        Role(
            identifier="TextEditor",
            kind=CONCRETE,
            relations=[has_a("TextWindow"), has_a("TextWindowState")],
            description="Caretaker",
        ),
    ],
)


OBSERVER = PatternEntry(
    name="Observer",
    category=PatternCategory.BEHAVIORAL,
    summary="Notify dependent objects automatically when an object changes state.",
    explanation=(
        "Observers register with the subject. When the subject changes it calls update "
        "on every observer, and each observer pulls the new state it cares about."
    ),
    roles=[
        Role(identifier="Subject", kind=INTERFACE, description="Subject"),
        Role(identifier="Observer", kind=INTERFACE, description="Observer"),
        Role(
            identifier="WeatherStation",
            kind=CONCRETE,
            relations=[implements("Subject"), has_a("Observer"), calls("Observer", "update()")],
            actions=["Temperature changed"],
            description="ConcreteSubject",
        ),
        Role(
            identifier="PhoneDisplay",
            kind=CONCRETE,
            relations=[implements("Observer"), calls("WeatherStation", "getTemperature()")],
            actions=["Display refreshed"],
            description="ConcreteObserver",
        ),
    ],
)


STATE = PatternEntry(
    name="State",
    category=PatternCategory.BEHAVIORAL,
    summary="Allow an object to alter its behavior when its internal state changes.",
    explanation=(
        "The document delegates publish() to its current state object. Each state "
        "implements publish() differently and moves the document to the next state, "
        "replacing a switch over status flags."
    ),
    roles=[
        Role(identifier="State", kind=INTERFACE, description="State"),
        Role(
            identifier="Document",
            kind=CONCRETE,
            relations=[has_a("State"), calls("State", "publish()")],
            description="Context",
        ),
        Role(
            identifier="DocumentState",
            kind=ABSTRACT,
            relations=[implements("State"), has_a("Document")],
        ),
        Role(
            identifier="DraftState",
            kind=CONCRETE,
            relations=[extends("DocumentState"), calls("Document", "changeState(moderation)")],
            actions=["Draft sent to moderation"],
            description="ConcreteState",
        ),
        Role(
            identifier="ModerationState",
            kind=CONCRETE,
            relations=[extends("DocumentState")],
            actions=["Document published"],
            description="ConcreteState",
        ),
        Role(
            identifier="PublishedState",
            kind=CONCRETE,
            relations=[extends("DocumentState")],
            actions=["Document is already published"],
            description="ConcreteState",
        ),
    ],
)


STRATEGY = PatternEntry(
    name="Strategy",
    category=PatternCategory.BEHAVIORAL,
    summary="Define a family of algorithms, encapsulate each one, and make them interchangeable.",
    explanation=(
        "The compression context holds a strategy and delegates compressFiles() to it. "
        "Switching from zip to rar is a matter of handing the context another strategy "
        "object."
    ),
    roles=[
        Role(identifier="CompressionStrategy", kind=INTERFACE, description="Strategy"),
        Role(
            identifier="CompressionContext",
            kind=CONCRETE,
            relations=[has_a("CompressionStrategy"), calls("CompressionStrategy", "compressFiles(files)")],
            description="Context",
        ),
        Role(
            identifier="ZipCompressionStrategy",
            kind=CONCRETE,
            relations=[implements("CompressionStrategy")],
            actions=["Zip compression"],
            description="ConcreteStrategy",
        ),
        Role(
            identifier="RarCompressionStrategy",
            kind=CONCRETE,
            relations=[implements("CompressionStrategy")],
            actions=["Rar compression"],
            description="ConcreteStrategy",
        ),
    ],
)


TEMPLATE_METHOD = PatternEntry(
    name="Template Method",
    category=PatternCategory.BEHAVIORAL,
    summary="Define the skeleton of an algorithm, deferring some steps to subclasses.",
    explanation=(
        "crossCompile() in the base class fixes the order of steps. Subclasses supply "
        "the platform-specific steps, collecting sources and compiling to the target, "
        "without being able to reorder them."
    ),
    roles=[
        Role(identifier="CrossCompiler", kind=ABSTRACT, description="AbstractClass"),
        Role(
            identifier="Client",
            kind=CONCRETE,
            relations=[calls("CrossCompiler", "crossCompile()")],
            description="Client",
        ),
        Role(
            identifier="IPhoneCompiler",
            kind=CONCRETE,
            relations=[extends("CrossCompiler")],
            actions=["Collect IPhone specific sources", "IPhone compilation"],
            description="ConcreteClass",
        ),
        Role(
            identifier="AndroidCompiler",
            kind=CONCRETE,
            relations=[extends("CrossCompiler")],
            actions=["Collect Android specific sources", "Android compilation"],
            description="ConcreteClass",
        ),
    ],
)


VISITOR = PatternEntry(
    name="Visitor",
    category=PatternCategory.BEHAVIORAL,
    summary="Represent an operation to be performed on the elements of an object structure.",
    explanation=(
        "Every city element accepts a visitor and calls back the visitor method for its "
        "own type. New operations, such as a tax calculation, are added as new visitors "
        "without touching the element classes."
    ),
    roles=[
        Role(identifier="Visitor", kind=INTERFACE, description="Visitor"),
        Role(identifier="CityElement", kind=INTERFACE, description="Element"),
        Role(
            identifier="City",
            kind=CONCRETE,
            relations=[
                composes("CityElement"),
                calls("Park", "accept(visitor)"),
                calls("ShoppingCenter", "accept(visitor)"),
                calls("IndustrialBuilding", "accept(visitor)"),
                calls("PrivateBuilding", "accept(visitor)"),
            ],
            description="ObjectStructure",
        ),
        Role(
            identifier="Park",
            kind=CONCRETE,
            relations=[implements("CityElement"), calls("Visitor", "doForPark(park)")],
            description="ConcreteElement",
        ),
        Role(
            identifier="ShoppingCenter",
            kind=CONCRETE,
            relations=[implements("CityElement"), calls("Visitor", "doForShoppingCenter(sc)")],
            description="ConcreteElement",
        ),
        Role(
            identifier="IndustrialBuilding",
            kind=CONCRETE,
            relations=[implements("CityElement"), calls("Visitor", "doForIndustrialBuilding(ib)")],
            description="ConcreteElement",
        ),
        Role(
            identifier="PrivateBuilding",
            kind=CONCRETE,
            relations=[implements("CityElement"), calls("Visitor", "doForPrivateBuilding(pb)")],
            description="ConcreteElement",
        ),
        Role(
            identifier="TaxVisitor",
            kind=CONCRETE,
            relations=[implements("Visitor")],
            actions=["Tax calculated"],
            description="ConcreteVisitor",
        ),
    ],
)


# ============================================================
# CATALOG AGGREGATION
# ============================================================

PATTERN_CATALOG = [
    # Creational
    SINGLETON,
    FACTORY_METHOD,
    ABSTRACT_FACTORY,
    BUILDER,
    PROTOTYPE,
    # Structural
    ADAPTER,
    DECORATOR,
    FACADE,
    COMPOSITE,
    PROXY,
    # Behavioral
    CHAIN_OF_RESPONSIBILITY,
    COMMAND,
    ITERATOR,
    MEDIATOR,
    MEMENTO,
    OBSERVER,
    STATE,
    STRATEGY,
    TEMPLATE_METHOD,
    VISITOR,
]
