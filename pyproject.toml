[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aeadkit"
version = "0.1.0"
description = "Authenticated encryption modes: EAX (one-shot and online), MGM and XSalsa20Poly1305"
requires-python = ">=3.10"
keywords = [
    "aead",
    "authenticated-encryption",
    "eax",
    "mgm",
    "gf128",
    "xsalsa20poly1305",
    "secretbox",
    "cryptography",
]
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
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "cryptography>=41",
    "pynacl>=1.5",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[tool.hatch.build.targets.wheel]
packages = ["aeadkit"]

[tool.hatch.build.targets.sdist]
include = ["aeadkit", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
