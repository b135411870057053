[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "autops"
version = "0.1.0"
description = "Domain model for an automation platform: projects, templates, workflows, users and access policies."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "automation",
    "infrastructure",
    "workflow",
    "policy",
    "access-control",
    "terraform",
    "ansible",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
autops-server = "autops.server:main"

[tool.hatch.build.targets.wheel]
packages = ["autops"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
