[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wgtray"
version = "0.1.0"
description = "A text-mode menu for bringing WireGuard tunnels up and down"
requires-python = ">=3.10"
dependencies = []
keywords = ["wireguard", "vpn", "wg-quick", "tunnels", "menu"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wgtray = "wgtray.app:main"

[tool.hatch.build.targets.wheel]
packages = ["wgtray"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
