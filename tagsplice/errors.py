# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

class Error(Exception): pass

class Warning(Error, UserWarning): pass

class FrameWarning(Warning): pass
class UnknownFrameWarning(FrameWarning): pass

class OpenError(Error, OSError): pass
class SpliceError(Error, OSError): pass

class FormatError(Error, ValueError): pass
class NoTagError(FormatError): pass
class FrameError(FormatError): pass

class TruncatedStreamError(Error, EOFError): pass

class UnknownFieldError(Error, KeyError): pass
class FrameNotFoundError(Error, KeyError): pass
