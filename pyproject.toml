[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prkindlabeler"
version = "0.1.0"
description = "Sync /kind commands in pull request bodies to GitHub labels and enforce release notes"
requires-python = ">=3.10"
keywords = ["github", "pull-request", "labels", "release-notes", "ci"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
]
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
pr-kind-labeler = "prkindlabeler.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["prkindlabeler"]

[tool.pytest.ini_options]
addopts = "-ra"
