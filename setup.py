from setuptools import setup, find_packages

setup(
    name="amiibo-nfc-converter",
    version="0.1.0",
    packages=find_packages(exclude=["tests"]),
    py_modules=["main"],
    install_requires=[
        "pyscard",  # Used for hex formatting of tag bytes
    ],
    extras_require={
        "test": ["pytest>=7"],  # pythonpath ini option
    },
    python_requires=">=3.7",
)
