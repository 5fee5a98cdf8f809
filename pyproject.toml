[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kubecolor"
version = "0.1.0"
description = "Colorize the output of kubectl and oc commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["kubectl", "kubernetes", "openshift", "oc", "color", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
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
test = ["pytest"]

[project.scripts]
kubecolor = "kubecolor.runner:main"

[tool.hatch.build.targets.wheel]
packages = ["kubecolor"]

[tool.pytest.ini_options]
addopts = "-ra"
