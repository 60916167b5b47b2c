import sys

from litetest import lite_class, lite_test


@lite_class
class Exits:
    @lite_test
    def check_a_exit(self):
        sys.exit(3)

    @lite_test
    def check_b_later(self):
        pass
