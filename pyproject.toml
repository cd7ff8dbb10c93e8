[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fiesta"
version = "0.1.0"
description = "Collector for game-server chat, item, movement and login logs, turned into column inserts"
requires-python = ">=3.11"
dependencies = [
    "pyjwt",
    "tomli-w",
]
keywords = ["logging", "game-server", "chat-log", "collector", "column-store", "jwt"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Log Analysis",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["fiesta"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
