import pathlib

import setuptools

here = pathlib.Path(__file__).parent.resolve()

long_description = (here / "README.md").read_text(encoding="utf-8")

setuptools.setup(
    name="eof-header",
    version="0.1.0",
    description="Reader and validator for EIP-3540 EOF1 container headers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="CC0-1.0",
    classifiers=[
        "License :: CC0 1.0 Universal (CC0 1.0) Public Domain Dedication",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
    ],
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    package_data={"eof_header": ["py.typed"]},
    python_requires=">=3.10",
    install_requires=[
        "ethereum-types>=0.2.1",
    ],
    extras_require={
        "test": [
            "pytest>=8.2.2",
            "pytest-cov>=4.1.0",
            "pytest-xdist>=3.3.1,<4",
        ],
        "lint": [
            "black==23.12.0",
            "isort==5.13.2",
            "mypy==1.10.0",
            "flake8==7.1.0",
            "flake8-bugbear==23.12.2",
            "flake8-docstrings==1.7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "eof-tool=eof_header_tools:main",
        ],
    },
)
