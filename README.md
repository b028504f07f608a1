# patternkit

A collection of small, self-contained examples of classic
object-oriented design patterns. Every pattern lives in its own module,
has plain classes you can import and combine, and comes with a short
demonstration you can run from the command line. The demonstrations
print what each object does, so you can follow the collaboration
between the participants of a pattern step by step.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running the demonstrations

Each pattern has a command of its own:

| Command | Pattern | What it shows |
| --- | --- | --- |
| `patternkit-abstract-factory` | Abstract Factory | BYD and Tesla factories building electric and oil cars |
| `patternkit-adapter` | Adapter | a 220 V socket adapted to a 5 V charging interface, by inheritance and by composition |
| `patternkit-bridge` | Bridge | two phone makes sharing one Bluetooth implementation |
| `patternkit-builder` | Builder | a director assembling chicken and beef burger meals |
| `patternkit-command` | Command | a waiter passing orders to a chef through a command |
| `patternkit-composite` | Composite | a picture drawing the shapes it contains |
| `patternkit-decorator` | Decorator | a component wrapped with extra behaviour |
| `patternkit-facade` | Facade | a main frame starting CPU, hard disk, memory and OS |
| `patternkit-factory-method` | Factory Method | a single factory creating humans by gender and race |
| `patternkit-flyweight` | Flyweight | cars sharing brand, model and colour state |
| `patternkit-mediator` | Mediator | two colleagues messaging through a mediator |
| `patternkit-prototype` | Prototype | message decorators cloned from registered prototypes |
| `patternkit-proxy` | Proxy | a computer proxy driving a car and a smartphone |
| `patternkit-strategy` | Strategy | contexts opening different strategies |

The adapter command runs both adapter styles by default; pass `class`
or `object` to run only one of them:

```
patternkit-adapter object
```

## Using the classes

The modules are ordinary Python and can be used directly.

```python
from patternkit.builder import ChickenBurgerMealBuilder, MealDirector

director = MealDirector(ChickenBurgerMealBuilder())
meal = director.construct_meal()
print(str(meal))  # burger, fries and drink, separated by commas
```

```python
from patternkit.composite import Picture, Rectangle, Triangle

picture = Picture("pic1")
picture.add(Triangle("tri1"))
picture.add(Rectangle("rec1"))
picture.draw()  # draws each child in order, then the picture itself
```

```python
from patternkit.factory_method import Gender, HumanFactory, Race, UnsupportedRaceError

factory = HumanFactory.instance()
human = factory.create_human(Gender.MALE, Race.YELLOW)
human.walk()
human.eat()

try:
    factory.create_human(Gender.FEMALE, Race.BLACK)
except UnsupportedRaceError as error:
    print(error)
```

Shared objects (`CarFactory` subclasses, `HumanFactory`,
`FlyweightFactory` and `DecoratorManager`) are reached through their
`instance()` class method. `CarFactory` subclasses, `HumanFactory` and
`DecoratorManager` also offer `release_instance()` to drop the shared
object again.

Every module also exposes `main(argv=None)`, the function behind its
command, so a demonstration can be run from Python:

```python
from patternkit import strategy

strategy.main()
```

## What is not included

The collection covers only the fourteen patterns listed above. There is
no stand-alone Singleton demonstration (shared instances appear only
inside the factory, flyweight and prototype examples), and there is no
Template Method example.