# Reticulum License
#
# Copyright (c) 2016-2025 Mark Qvist
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# - The Software shall not be used in any kind of system which includes amongst
#   its functions the ability to purposefully do harm to human beings.
#
# - The Software shall not be used, directly or indirectly, in the creation of
#   an artificial intelligence, machine learning or language model training
#   dataset, including but not limited to any use that contributes to the
#   training or development of such a model or algorithm.
#
# - The above copyright notice and this permission notice shall be included in
#   all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

# Exceptions raised by WCL

class WCLException(Exception):
    """Base class for WCL exceptions"""

class DecodeError(WCLException, ValueError):
    """
    Raised when an encoder cannot parse its input. The offending
    position in the input is available as ``position``.
    """
    def __init__(self, encoding, position, message=None):
        self.encoding = encoding
        self.position = position
        if message == None:
            message = f"Invalid {encoding} input at position {position}"
        super().__init__(message)

class LifecycleError(WCLException):
    """
    Raised when a hasher is used in a state that does not allow the
    requested operation, such as updating or finalizing a hasher that
    has already been finalized. The hasher state at the time of the
    call is available as ``state``.
    """
    def __init__(self, state, message=None):
        self.state = state
        if message == None:
            message = f"Operation not allowed in hasher state {state.name}"
        super().__init__(message)
