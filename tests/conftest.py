"""
Common test configuration for all test subdirectories.
Put here only those things that can not be done through command line options and pytest.ini file.
"""

import pytest
import os
import sys

# add tests dir to sys path in order to get access to the 'fixtures' module.
this_source_dir = os.path.dirname(os.path.realpath(__file__))
sys.path.append(this_source_dir)


@pytest.fixture
def animal():
    """
    Small delegation chain: Clonable <- animal.
    """
    from protomix import Clonable

    def init(self, name, sound="..."):
        self.name = name
        self.sound = sound

    def speak(self):
        return f"{self.name} says {self.sound}"

    return Clonable.clone({'init': init, 'speak': speak, 'legs': 4})
