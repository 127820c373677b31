from setuptools import setup, find_packages

setup(
    name="satim_status",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        'flask',
        'python-dotenv',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
)
