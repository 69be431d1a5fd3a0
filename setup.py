from setuptools import setup


setup(
    name='rpnstack',
    version='0.1.0',
    description='RPN calculator core',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['rpnstack'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    python_requires='>=3.8',
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
        ],
    },
    entry_points={
        'console_scripts': [
            'rpnstack = rpnstack.cli:main',
        ],
    },
    license='ISC',
)
