from setuptools import setup, find_packages

setup(
    name="svg-to-jsx",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "svgjsx": ["config/*.yaml", "templates/*.jsx"],
    },
    python_requires=">=3.9",
    install_requires=[
        "lxml",
        "pyyaml",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "svg-to-jsx=svgjsx.main:main",
        ],
    },
)
