from setuptools import setup, find_packages
import re

# Read version from gdrive_storage/__init__.py
with open('gdrive_storage/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='gdrive-storage',
    version=version,
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8',
    install_requires=[
        'google-api-python-client',
        'google-auth',
        'google-auth-oauthlib',
        'python-dotenv',
        'click>=8.0',
        'PyYAML',
        'click_option_group',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'gdrive-storage=gdrive_storage.cli.__main__:main',
        ],
    },
    author='CLI Developer',
    description='Google Drive storage adapter - upload, search, list, metadata and disk operations behind one facade.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
)
