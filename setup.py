""" btcecc build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import btcecc

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=btcecc.name,
    version=btcecc.__version__,
    url="https://btcecc.org",
    license=btcecc.__license__,
    author=btcecc.__author__,
    author_email=btcecc.__author_email__,
    description="secp256k1 ECDSA from first principles",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["dataclasses_json"],
    extras_require={
        "test": ["pytest"],
        "docs": ["sphinx", "myst_parser", "sphinx_rtd_theme"],
    },
    keywords=(
        "bitcoin cryptography elliptic-curves ecdsa secp256k1 "
        "finite-fields SEC DER"
    ),
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
