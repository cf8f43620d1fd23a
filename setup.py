from setuptools import setup, find_packages

setup(
    name="connect4-engine",
    version="0.1.0",
    description="Connect Four game engine with a heuristic computer opponent",
    packages=find_packages(include=["connect4engine", "connect4engine.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "gymnasium",  # Gymnasium environment wrapper
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "connect4-engine=connect4engine.interfaces.cli:main",
        ],
    },
)
