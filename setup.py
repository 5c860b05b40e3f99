import setuptools

setuptools.setup(
    name = 'autogis',
    version = '0.1',
    description = 'minimal planar vector geometry with WKT output',
    packages = setuptools.find_packages(exclude=['tests', 'tests.*']),
    python_requires = '>=3.8',
    install_requires=['numpy'],
    extras_require={'test': ['pytest']},
)
