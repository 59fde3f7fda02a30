from setuptools import setup

tests_require = [
    'mock',
    'testtools'
]

setup(
    name='MockVerify',
    version='0.0.1',
    description='Verification of recorded mock invocations',
    packages=[
        'mockverify',
        'mockverify.test',
    ],
    install_requires=[
        'testtools',
        'Twisted',
        'zope.interface'
    ],
    tests_require=tests_require,
    extras_require={
        'tests': tests_require
    },
    python_requires='>=3.6',
    zip_safe=False,
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Testing :: Mocking'
    ],
)
