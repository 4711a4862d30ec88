# setup.py
from setuptools import find_packages, setup

setup(
    name="WorldIndex",
    version="0.1.0",
    packages=find_packages(include=["world", "world.*", "engine", "engine.*", "tools", "tools.*"]),
    python_requires=">=3.8",
    install_requires=["NBT>=1.5"],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "worldindex=tools.index_world:main",
            "worldindex-mkworld=tools.make_world:main",
        ],
    },
)
