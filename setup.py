from __future__ import annotations

from setuptools import find_packages, setup  # type: ignore


setup(
    name="bonekey",
    version="1.0.0",
    description="Add keyframes to all visible bones of an animation in one undo step",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
