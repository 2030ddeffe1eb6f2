from setuptools import setup, find_packages
import re

# Read version from gdocs/__init__.py
with open('gdocs/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='gdocs-mcp',
    version=version,
    packages=find_packages(include=['gdocs', 'gdocs.*']),
    install_requires=[
        'google-api-python-client',
        'google-auth',
        'google-auth-oauthlib',
        'httplib2',
        'python-dotenv',
        'click>=8.0',
        'PyYAML',
        'click_option_group',
        'mcp>=1.0.0,<2',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'gdocs=gdocs.cli.__main__:main',
            'gdocs-mcp=gdocs.mcp.server:run_server',
        ],
    },
    author='CLI Developer',
    description='Google Docs access - SDK, CLI, and MCP server for reading, creating, updating and searching documents.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
)
