from importlib.machinery import SourceFileLoader
from pathlib import Path
from types import ModuleType

from setuptools import find_packages, setup

loader = SourceFileLoader("mdeck", "./src/mdeck/__init__.py")
mdeck = ModuleType(loader.name)
loader.exec_module(mdeck)

setup(
    name="mdeck",
    version=mdeck.__version__,  # type: ignore
    description="Present markdown documents as full-screen terminal slides.",
    long_description=(Path(__file__).parent / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    python_requires=">=3.11",
    package_dir={"": "src"},
    packages=find_packages("src", exclude=["tests"]),
    entry_points={"console_scripts": ["mdeck=mdeck.cli:main"]},
    install_requires=[
        "appdirs",
        "cyclopts",
        "Pillow",
        "pydantic>=2",
        "Pygments",
        "PyYAML",
        "rich",
    ],
    extras_require={"test": ["pytest"]},
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
)
