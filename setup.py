#!/usr/bin/env python3

from setuptools import setup

setup(
    name="tagsplice",
    version="0.1.0",
    author="Karoly Lorentey",
    author_email="karoly@lorentey.hu",
    packages=["tagsplice"],
    install_requires=[
        "rich",
        "rich-argparse",
        ],
    entry_points = {
        'console_scripts': ['tagsplice = tagsplice.commandline:main']
    },
    license="BSD",
    description="View and edit the text frames of ID3v2 tags in MP3 files",
    long_description="""
Tagsplice reads the six common text frames (title, artist, album,
year, genre, comment) of an MP3 file's ID3v2 tag and replaces the
content of any one of them, rebuilding the file so that frame sizes
and the audio data that follows stay consistent when the new text is
longer or shorter than the old.
""",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Topic :: Multimedia :: Sound/Audio"
        ],
    )
