"""Shared fixtures for tests."""

from datetime import datetime

import pytest

from docassert.generator.renderer import JinjaRenderer
from docassert.metadata.loader import parse_metadata


@pytest.fixture
def timestamp() -> datetime:
    """A fixed generation time."""
    return datetime(2024, 5, 17, 9, 30, 15)


@pytest.fixture
def renderer() -> JinjaRenderer:
    """Renderer using the packaged templates."""
    return JinjaRenderer()


@pytest.fixture
def calculator_yaml() -> str:
    """Return metadata for a small calculator class."""
    return """
class: Calculator
module: calculator
doc: |
  A calculator with a memory.

  @assert (10)
methods:
  - name: __init__
    constructor: true
    doc: Create a calculator.
  - name: add
    doc: |
      Add two numbers.

      @assert (2, 3) == 5
      @assert (0, 0) == 0
  - name: divide
    doc: |
      @assert (1, 0) throws ZeroDivisionError
  - name: history
    doc: |
      @assert () empty FALSE
  - name: reset
    doc: Forget the memory.
  - name: _scale
    visibility: private
    doc: |
      @assert (2) == 20
  - name: pi
    static: true
    doc: |
      @assert () > 3
"""


@pytest.fixture
def calculator_metadata(calculator_yaml):
    """Return parsed calculator metadata."""
    return parse_metadata(calculator_yaml)


@pytest.fixture
def calculator_source() -> str:
    """Source of a Python class annotated with @assert tags."""
    return '''"""A calculator module."""

import abc


class Base:
    def inherited(self):
        """@assert () == 1"""
        return 1


class Calculator(Base):
    """A calculator with a memory.

    @assert (10)
    """

    def __init__(self, memory=0):
        self.memory = memory

    def add(self, a, b):
        """Add two numbers.

        @assert (2, 3) == 5
        @assert (0, 0) == 0
        """
        return a + b

    def divide(self, a, b):
        """@assert (1, 0) throws ZeroDivisionError"""
        return a / b

    def history(self):
        """@assert () empty FALSE"""
        return [self.memory]

    def reset(self):
        """Forget the memory."""
        self.memory = 0

    def _scale(self, value):
        """@assert (2) == 20"""
        return value * self.memory

    @staticmethod
    def pi():
        """@assert-approx
            Roughly pi.
            () > 3
        """
        return 3.14

    @classmethod
    def named(cls, memory):
        """@assert (5) instanceof Calculator"""
        return cls(memory)

    @property
    def doubled(self):
        """@assert () == 20"""
        return self.memory * 2


class Shape(abc.ABC):
    @abc.abstractmethod
    def area(self):
        """@assert () == 0"""
'''
