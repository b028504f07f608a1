"""Runnable examples of fourteen classic object-oriented design patterns."""

__version__ = "0.1.0"

__all__ = [
    "abstract_factory",
    "adapter",
    "bridge",
    "builder",
    "command",
    "composite",
    "decorator",
    "facade",
    "factory_method",
    "flyweight",
    "mediator",
    "prototype",
    "proxy",
    "strategy",
]