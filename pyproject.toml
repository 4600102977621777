[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "starterkit"
version = "0.1.0"
description = "Small command-line programs: a greeter, a todo list, a number guessing game and an HTTP server"
requires-python = ">=3.10"
dependencies = [
    "python-dotenv",
    "termcolor",
]
keywords = ["cli", "todo", "game", "http-server", "wsgi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
starterkit-hello = "starterkit.hello.hello_cli:main"
starterkit-todo = "starterkit.todo.todo_cli:main"
starterkit-guess = "starterkit.guess.guess_cli:main"
starterkit-server = "starterkit.webserver.server_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["starterkit"]

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
