# Copyright (c) 2022-2023 SiumLhahah
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.

""""
sysext.lib.exceptions

Errors raised by the strict helpers.

"""


class ErrorMetaclass(type):
    """Error Metaclass"""

    def __new__(cls, name, base=Exception, attrs=None):
        attrs = {} if attrs is None else dict(attrs)

        def init(self, msg=None):
            base.__init__(self, msg)
            self.msg = msg
        attrs['__init__'] = init
        attrs['__str__'] = lambda self: str(self.msg)
        return type.__new__(cls, name, (base,), attrs)

    def __init__(cls, name, base=Exception, attrs=None):
        super().__init__(name, (base,), attrs or {})


AlgorithmError = ErrorMetaclass('AlgorithmError', NotImplementedError)
DecryptionFailed = ErrorMetaclass('DecryptionFailed', ValueError)
InvalidArgument = ErrorMetaclass('InvalidArgument', ValueError)
InvalidKeyMaterial = ErrorMetaclass('InvalidKeyMaterial', ValueError)
MemberNotFound = ErrorMetaclass('MemberNotFound', AttributeError)
