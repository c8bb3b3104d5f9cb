import setuptools

__version__ = '0.1.0'



with open("README.md", "r") as fh:
    long_description = fh.read()


setuptools.setup(
    name='protomix',
    version=__version__,
    license='MIT',
    description='Mixin composition, delegation based objects and point-free accessors.',
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        # complete classifier list: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries',
    ],

    keywords=['mixin', 'prototype', 'delegation', 'functional'],

    packages=['protomix'],
    package_dir={'': 'src'},

    include_package_data=True,
    zip_safe=False,
    install_requires=['attrs'],
    python_requires='>=3.7',
    extras_require={
        'test': ['pytest'],
    },
)
