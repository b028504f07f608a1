[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternkit"
version = "0.1.0"
description = "Small runnable examples of classic object-oriented design patterns"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design patterns",
    "abstract factory",
    "adapter",
    "bridge",
    "builder",
    "command",
    "composite",
    "decorator",
    "facade",
    "factory method",
    "flyweight",
    "mediator",
    "prototype",
    "proxy",
    "strategy",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternkit-abstract-factory = "patternkit.abstract_factory:main"
patternkit-adapter = "patternkit.adapter:main"
patternkit-bridge = "patternkit.bridge:main"
patternkit-builder = "patternkit.builder:main"
patternkit-command = "patternkit.command:main"
patternkit-composite = "patternkit.composite:main"
patternkit-decorator = "patternkit.decorator:main"
patternkit-facade = "patternkit.facade:main"
patternkit-factory-method = "patternkit.factory_method:main"
patternkit-flyweight = "patternkit.flyweight:main"
patternkit-mediator = "patternkit.mediator:main"
patternkit-prototype = "patternkit.prototype:main"
patternkit-proxy = "patternkit.proxy:main"
patternkit-strategy = "patternkit.strategy:main"

[tool.hatch.build.targets.wheel]
packages = ["patternkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
