"""
Setup configuration for voice-aura component.
"""

from setuptools import setup, find_packages

TEST_REQUIRES = [
    'pytest>=7.4.0',
    'pytest-asyncio>=0.21.0',
    'pytest-cov>=4.1.0',
]

setup(
    name='voice-aura',
    version='1.0.0',
    description='Voice tone emotion classification and profile aggregation for poem recommendations',
    author='Voice Aura Team',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.11',
    install_requires=[
        'boto3>=1.28.0',
        'botocore>=1.31.0',
        'librosa>=0.10.0',
        'numpy>=1.24.0',
        'soundfile>=0.12.0',
    ],
    extras_require={
        'test': TEST_REQUIRES,
        'dev': TEST_REQUIRES + [
            'pylint>=2.17.0',
            'flake8>=6.0.0',
            'black>=23.0.0',
            'mypy>=1.4.0',
        ]
    }
)
