# Copyright Amazon.com, Inc. or its affiliates. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#
import setuptools

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()


with open("VERSION", "r", encoding="utf-8") as version_file:
    version = version_file.read().strip()


setuptools.setup(
    name="s3detector",
    version=version,
    author="AWS",
    description="Detects Amazon S3 URL shapes and rewrites them into canonical s3:: URLs",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3.11",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        "boto3>=1.28.17",
        "botocore>=1.31.17",
    ],
    extras_require={
        "test": [
            "mock>=4.0.3",
            "pytest-mock>=3.5.1",
            "pytest>=7.0",
        ],
        "dev": [
            "isort",
            "black",
            "pre-commit",
        ],
    },
)
