from litetest import lite_class, lite_test

from .direct import Direct


@lite_class
class LiteHelper:
    @lite_test
    def check_internal(self):
        pass


class DirectSubclass(Direct):
    pass
