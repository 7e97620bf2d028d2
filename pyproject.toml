[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "idiomkit"
version = "0.1.0"
description = "Small worked examples of containers, concurrency patterns and puzzle algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "examples",
    "vector",
    "thread-pool",
    "singleton",
    "algorithms",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
idiomkit-vector = "idiomkit.vector:main"
idiomkit-cards = "idiomkit.cards:main"
idiomkit-substrings = "idiomkit.substrings:main"
idiomkit-colortree = "idiomkit.colortree:main"
idiomkit-bits = "idiomkit.bits:main"
idiomkit-threadpool = "idiomkit.threadpool:main"
idiomkit-singleton = "idiomkit.singleton:main"
idiomkit-alternate = "idiomkit.alternate:main"

[tool.hatch.build.targets.wheel]
packages = ["idiomkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
