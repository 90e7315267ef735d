import setuptools

with open("README.rst", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="lensletgen",
    version="0.1.0",
    author="Michael J Hayford",
    author_email="mjhoptics@gmail.com",
    description="Hexagonal lenslet tiling of spherical near-eye displays",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    license="BSD-3-Clause",
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    python_requires=">=3.9",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Physics",
    ],
    keywords=['geometric optics', 'near-eye display', 'lenslet array',
              'microlens', 'paraxial optics', 'hexagonal tiling'],
    install_requires=[
        "numpy>=1.15.0",
        "scipy>=1.1.0",
        "matplotlib>=2.2.3",
        "pandas>=0.23.4",
        "attrs>=22.2.0",
        "transforms3d>=0.3.1"
        ],
    extras_require={
        'test': ["pytest"],
    },
)
