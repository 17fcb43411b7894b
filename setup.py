import re
import setuptools

with open('README.md', 'r') as rmd:
    long_description = rmd.read()

version = ''
with open('discordkit/__init__.py') as initpy:
    version = re.search(r'^__version__\s*=\s*[\'"]([^\'"]*)[\'"]', initpy.read(), re.MULTILINE).group(1)

if not version:
    raise RuntimeError('Version is not set.')

setuptools.setup(
    name='discordkit.py',
    version=version,
    author='discordkit.py contributors',
    description='Typed models, permission flags and a REST primitive for Discord\'s API',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=['discordkit', 'discordkit.types'],
    license='MIT',
    classifiers=[
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Natural Language :: English'
    ],
    python_requires='>=3.8.0',
    install_requires=['aiohttp', 'typing_extensions>=4.0'],
    extras_require={
        'test': ['pytest', 'anyio'],
    },
)
