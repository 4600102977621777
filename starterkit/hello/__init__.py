"""A configurable greeting command."""