from setuptools import setup, find_packages

setup(
    name="shell-prompt",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "click",
        "rich",
        "python-dotenv",
        "PyYAML",
        "pydantic>=2",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "shellprompt=shellprompt.cli.commands:cli",
        ],
    },
    python_requires=">=3.9",
)
