[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "appauth"
version = "0.1.0"
description = "User accounts, login sessions, roles and permissions stored in SQLite, with account e-mail templates and OIDC provider settings"
requires-python = ">=3.10"
dependencies = []
keywords = ["authentication", "sessions", "permissions", "roles", "oidc", "sqlite"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Session",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["appauth"]

[tool.pytest.ini_options]
addopts = "-ra"
