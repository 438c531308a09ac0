from setuptools import find_packages, setup


setup(
    name='django-base62',
    version='0.1.0',
    description='Base62 encoding of integer ids, with URL converters and template filters for Django.',
    #long_description=open('README').read(),

    # Get more strings from https://pypi.org/classifiers/
    classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Intended Audience :: Developers",
        "Framework :: Django",
        "Development Status :: 3 - Alpha",
        "Environment :: Web Environment",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: BSD License"
    ],
    keywords='django base62 encoding url id shortener',
    author='Alex Ehlke',
    author_email='alex.ehlke@gmail.com',
    license='BSD',
    packages=find_packages(exclude=['ez_setup']),
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.8',
    install_requires=[
        'Django',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
)
