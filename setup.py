from setuptools import setup, find_packages

setup(
    name="minesweeper_sim",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "flask",
        "pyyaml",
        "numpy"
    ],
    package_data={
        "backend": ["game_config.yaml"]
    },
    extras_require={
        "test": ["pytest"]
    },
    entry_points={
        "console_scripts": [
            "minesweeper-ui=frontend.app:main"
        ]
    },
)
