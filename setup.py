from setuptools import find_packages, setup  # type: ignore

# Do not forget to update and sync the fields in symkind/__init__.py!
#
# It is almost impossible to refer to the symkind/__init__.py from within
# setup.py as the source distribution will run setup.py while installing the
# package. That is why we can not be DRY here and need to sync manually.
setup(
    name="symkind",
    version="0.1.0",  # Update this in symkind/__init__.py too
    package_data={"symkind": ["py.typed"]},
    packages=find_packages(include=["symkind", "symkind.*"]),
    scripts=[],
    entry_points={
        "console_scripts": [
            "symkind=symkind.main:main",
        ],
    },
    license="MIT",
    description="Kinds (logical sorts) and concrete values for symbolic execution.",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    install_requires=[
        "numpy",
        "typing-inspect>=0.7.1",
        "z3-solver>=4.13.0.0",
    ],
    extras_require={
        "dev": [
            "black==25.9.0",
            "isort==5.11.5",
            "mypy==1.18.1",
            "pytest",
            "pytest-xdist",
        ]
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Software Development :: Quality Assurance",
        "Topic :: Software Development :: Testing",
    ],
    python_requires=">=3.8",
)
