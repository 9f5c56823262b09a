[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cipherkit"
version = "0.1.0"
description = "Classical and block ciphers with small command-line tools: Caesar, Vigenere, Vernam, Hill, Playfair, Diffie-Hellman, RSA, DES and AES"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cipher",
    "cryptography",
    "caesar",
    "vigenere",
    "vernam",
    "hill",
    "playfair",
    "des",
    "aes",
    "rsa",
    "diffie-hellman",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cipherkit-caesar = "cipherkit.caesar:main"
cipherkit-dh = "cipherkit.diffie_hellman:main"
cipherkit-rsa = "cipherkit.rsa:main"
cipherkit-hill = "cipherkit.hill:main"
cipherkit-playfair = "cipherkit.playfair:main"
cipherkit-des = "cipherkit.des:main"
cipherkit-aes-key = "cipherkit.aes_key:main"
cipherkit-aes = "cipherkit.aes:main"
cipherkit-aes-trace = "cipherkit.aes_trace:main"
cipherkit-aes-file = "cipherkit.aes_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cipherkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
