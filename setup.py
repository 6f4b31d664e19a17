from setuptools import setup

setup(
    name="stage-scaffold",
    version="0.1.0",
    package_dir={"": "src"},
    py_modules=["scaffold_feature", "scaffold_gen", "scaffold_names", "scaffold_steps"],
    install_requires=["gherkin-official>=24"],
    extras_require={"test": ["pytest", "approvaltests"]},
    entry_points={"console_scripts": ["stage-scaffold=scaffold_gen:main"]},
    python_requires=">=3.10",
)
