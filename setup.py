# setup.py
from setuptools import setup, find_packages

setup(
    name="minim",
    version="0.1.0",
    description="A minimal Lisp-like expression interpreter",
    packages=find_packages(include=["minim", "minim.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["minim = minim.__main__:main"],
    },
    zip_safe=False,
)
