from litetest import assert_equals, lite_class, lite_test


@lite_class
class Alpha:
    @lite_test
    def checkOne(self):
        assert_equals(2, 1 + 1)
