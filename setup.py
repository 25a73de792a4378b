from setuptools import setup

setup(
    name='sysext',
    version='0.1.0',
    description="Small helpers layered on bytes, collections, strings,"
    " callbacks, numbers, object members and time values.",
    author='SiumLhahah',
    author_email='siumlhahah@outlook.com',
    packages=[
        'sysext',
        'sysext.lib',
        'sysext.utils',
    ],
    license='MIT',
    python_requires='>=3.11',
    install_requires=[
         'cryptography',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
)
