#!/usr/bin/env python3
"""Setup for municipal.structures package."""

import setuptools

from scripts import setup_functions as sf

REQUIREMENTS = sf.parse_requirements("requirements/requirements.txt")
TEST_REQUIREMENTS = sf.parse_requirements("requirements/requirements_test.txt")

EXTRAS_REQUIRE = {"tests": TEST_REQUIREMENTS}

setuptools.setup(
    name="municipal-structures",
    version="0.1.0",
    description="Containers, trees, heap and graph for municipal service requests",
    keywords=[],
    license="Apache 2.0",
    platforms="any",
    include_package_data=True,
    packages=setuptools.find_namespace_packages("src", include=["municipal.*"]),
    package_dir={"": "src"},
    install_requires=REQUIREMENTS,
    python_requires=">=3.11",
    test_suite="tests",
    extras_require=EXTRAS_REQUIRE,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries",
    ],
)
