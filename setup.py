# setup.py
from setuptools import setup, find_packages

setup(
    name="lispy",
    version="0.0.0.0.5",
    description="A minimal s-expression arithmetic interpreter",
    packages=find_packages(include=["lispy", "lispy.*"]),
    python_requires=">=3.10",
    install_requires=[
        "lark>=1.1",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lispy=lispy.__main__:main"],
    },
    zip_safe=False,
)
