# setup.py
from setuptools import setup, find_packages

setup(
    name="unity-lisp",
    version="0.1.0",
    description="Translate a small Lisp dialect to UnityScript",
    packages=find_packages(include=["unity_lisp", "unity_lisp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["unity-lisp=unity_lisp.cli:main"],
    },
    zip_safe=False,
)
