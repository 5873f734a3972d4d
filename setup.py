from setuptools import setup
from pathlib import Path

this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

setup(
    name="bytesurge",
    version="1.0.0",
    description="Terminal screensaver that types synthetic source code like a human",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=["bytesurge", "bytesurge.keyboard", "bytesurge.codegen"],
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["bytesurge=bytesurge.__main__:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
)
