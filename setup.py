# setup.py
from setuptools import setup, find_packages

setup(
    name="frothy",
    version="0.1.0",
    description="Interpreter for Frothy, a postfix expression language",
    packages=find_packages(include=["frothy", "frothy.*", "frothy_lsp", "frothy_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "lsp": ["pygls>=1.0,<2", "lsprotocol"],
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "frothy=frothy.__main__:main",
            "frothy-ls=frothy_lsp.server:main",
        ],
    },
    zip_safe=False,
)
