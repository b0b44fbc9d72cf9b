from setuptools import setup, find_packages

setup(
    name="icsinvite",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={"icsinvite": ["py.typed"]},
    python_requires=">=3.11",
    install_requires=[
        'icalendar>=5.0.0',
        'PyYAML>=6.0',
        'flask>=3.0.0',
        'tabulate>=0.9.0',
        'typing_extensions>=4.5.0'
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0'
        ]
    },
    entry_points={
        'console_scripts': [
            'icsinvite=icsinvite.cli:main'
        ]
    }
)
