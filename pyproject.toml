[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "upkit-x509"
version = "0.1.0"
description = "Building and reading X.509 certificate extensions, and parsing DER certificates, on top of the cryptography library"
requires-python = ">=3.10"
keywords = ["x509", "pki", "certificate", "extensions", "der"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["upkit_x509"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
