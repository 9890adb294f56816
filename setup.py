# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="mlisp",
    version="0.1.0",
    description="Tree-walking evaluator for a minimal S-expression language",
    python_requires=">=3.10",
    packages=find_namespace_packages(include=["mlisp", "mlisp.*"]),
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["mlisp=mlisp.repl:main"],
    },
    zip_safe=False,
)
