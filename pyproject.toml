[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "radixui"
version = "0.1.0"
description = "Accessible, Radix-style UI primitives rendered to HTML: checkbox, switch, progress, separator and label"
requires-python = ">=3.10"
dependencies = []
keywords = ["ui", "components", "accessibility", "aria", "html", "radix", "wsgi"]
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
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
radixui-demo = "radixui.app:main"

[tool.hatch.build.targets.wheel]
packages = ["radixui"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
