[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "schoolkit"
version = "0.1.0"
description = "Small school and hobby utilities: statistics, equation helpers, wire sizing, visit tracking, games and build helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "statistics",
    "equations",
    "calculator",
    "education",
    "tic-tac-toe",
    "build",
    "utilities",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mathbits = "schoolkit.mathbits:main"
meritcalc = "schoolkit.merit:main"
derivata = "schoolkit.derivative:main"
eqsolve = "schoolkit.solvers:main"
eqfunc = "schoolkit.graph_equations:main"
gruvlinan = "schoolkit.wire:main"
cmpp = "schoolkit.medley:main"
tictactoe = "schoolkit.tictactoe:main"
evalcalc = "schoolkit.calculator:main"
buildtool = "schoolkit.buildtool:main"
gomake = "schoolkit.gomake:main"
solfetch = "schoolkit.solus:main_fetch"
solloc = "schoolkit.solus:main_local"
getfile = "schoolkit.download:main"
reaction = "schoolkit.reaction:main"
diary = "schoolkit.diary:main"

[tool.hatch.build.targets.wheel]
packages = ["schoolkit"]

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
