from setuptools import setup

setup(
    name='monkey-interpreter',
    version='0.1.0',
    description='Tree-walking interpreter for the Monkey programming language',
    author='Monkey contributors',
    package_dir={'': 'src'},
    packages=['monkey', 'monkey.parser', 'monkey.evaluator', 'monkey.cli'],
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'click>=7.0',
        'rich>=10.0'
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'monkey = monkey.cli.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
