# setup.py
from setuptools import setup, find_packages

setup(
    name="fnkit",
    version="0.2.0",
    description="Functional helpers over dynamic values: predicates, deep equality, deep copy",
    packages=find_packages(include=["fnkit", "fnkit.*"]),
    python_requires=">=3.10",
    install_requires=["numpy"],
    extras_require={"test": ["pytest", "hypothesis"]},
    zip_safe=False,
)
