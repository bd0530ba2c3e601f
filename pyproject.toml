[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkedkit"
version = "0.1.0"
description = "Singly, doubly and circular linked lists with stack and queue built on top"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "doubly linked list", "circular list", "stack", "queue", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linkedkit-list-demo = "linkedkit.demo_list:main"
linkedkit-dlist-demo = "linkedkit.demo_dlist:main"
linkedkit-stack-demo = "linkedkit.demo_stack:main"
linkedkit-float-stack-demo = "linkedkit.demo_float_stack:main"

[tool.hatch.build.targets.wheel]
packages = ["linkedkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
