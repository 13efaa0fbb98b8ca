from setuptools import setup, find_packages

with open("Readme.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="workstation-config-collector",
    version="1.0.0",
    author="Workstation Migration Team",
    description='Relève la configuration utilisateur d\'un poste Windows avant migration.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    include_package_data=True,
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires='>=3.8',
    install_requires=[
        "psutil>=5.9.0",
        "pywin32>=306; platform_system=='Windows'",
        "WMI>=1.5.1; platform_system=='Windows'",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },

    entry_points='''
        [console_scripts]
        workstation-config-collector=wscollector.main:main
    '''
)
