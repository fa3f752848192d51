import os

from setuptools import find_packages, setup

CURR_DIR = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(CURR_DIR, "README.rst"), encoding="utf-8") as file_open:
    LONG_DESCRIPTION = file_open.read()

with open(os.path.join(CURR_DIR, "requirements.txt"), "r") as requirements_file:
    raw_requirements = requirements_file.read().strip().split("\n")

INSTALL_REQUIRES = [
    line for line in raw_requirements if not (line.startswith("#") or line == "")
]


exec(open(os.path.join(CURR_DIR, "ordercompy", "_version.py")).read())


# No versioning on extras for dev, always grab the latest
EXTRAS_REQUIRE = {
    "tests": [
        "pytest",
        "pytest-cov",
    ],
    "qa": [
        "pre-commit",
        "black",
        "isort",
    ],
    "build": ["twine", "wheel"],
}

EXTRAS_REQUIRE["dev"] = (
    EXTRAS_REQUIRE["tests"] + EXTRAS_REQUIRE["qa"] + EXTRAS_REQUIRE["build"]
)


setup(
    name="ordercompy",
    version=__version__,
    description="Pluggable three-way comparators in Python",
    long_description=LONG_DESCRIPTION,
    license="Apache-2.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,
    python_requires=">=3.10",
    zip_safe=False,
)
