[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polic"
version = "0.1.0"
description = "Function-level security policies for sandboxed and virtualized environments"
requires-python = ">=3.10"
dependencies = []
keywords = ["security", "sandbox", "policy", "decorator", "enforcement"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
polic-demo = "polic.enforcer:main"
polic-simple-demo = "polic.simple:main"

[tool.hatch.build.targets.wheel]
packages = ["polic"]

[tool.pytest.ini_options]
addopts = "-ra"
