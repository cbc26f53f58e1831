from io import open
from setuptools import setup, find_packages

long_description=open('README.rst', 'r', encoding='utf8').read()

setup(
    name='lunaconfig',
    version='0.1.0',
    description='A one-character-lookahead parser for Luna configuration files',
    long_description=long_description,
    long_description_content_type='text/x-rst',
    license='MIT',
    packages=find_packages(exclude=['ez_setup']),
    include_package_data=True,
    python_requires='>=3.7',
    install_requires=['regex>=2022.3.15'],
    extras_require={'test': ['pytest']},
    classifiers=[
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
        'Topic :: Text Processing :: General'],
    keywords=['parse', 'parser', 'config', 'configuration'],
)
