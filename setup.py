from setuptools import setup
import os
import re

def version_from_init():
    with open("./httperror/__init__.py", "r") as f:
        lines = f.readlines()
        for line in lines:
            result = re.match(r'\s*__version__\s*=\s*"(\d+.\d+.\d+(.\d+)*)"', line)
            if result is not None:
                return result.group(1)
    raise RuntimeError("not found version in httperror/__init__.py")

def get_packages(package):
    return [
        dirpath
        for dirpath, dirnames, filenames in os.walk(package)
        if os.path.exists(os.path.join(dirpath, "__init__.py"))
    ]

setup(
	name="httperror",
	version=version_from_init(),
	description="typed catalog of HTTP error statuses",
    packages = get_packages("httperror"),
    python_requires = ">=3.8",
    install_requires = [],
    extras_require = {
        "test": [
            "pytest >= 6",
            "pytest-cov >= 3.0.0",
        ],
    },
)
