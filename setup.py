# setup.py
from setuptools import find_namespace_packages, setup

setup(
    name="include-analyser",
    version="0.1.0",
    description="Herramienta para analizar las dependencias #include de proyectos C/C++",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["include_analyser*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        'console_scripts': [
            'include-analyser=include_analyser.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: C",
        "Operating System :: OS Independent",
    ],
)
