from litetest import assert_equals, lite_class, lite_test


def _explode():
    return {}["missing"]


@lite_class
class Faults:
    @lite_test
    def check_passes(self):
        pass

    @lite_test
    def check_assert_helper(self):
        assert_equals(1, 2, "numbers differ")

    @lite_test
    def check_plain_assert(self):
        assert 1 == 2, "plain assert"

    @lite_test
    def check_divides(self):
        return 1 / 0

    @lite_test
    def check_nested_fault(self):
        _explode()


@lite_class
class Unbuildable:
    def __init__(self, required):
        self.required = required

    @lite_test
    def check_never_runs(self):
        pass


@lite_class
class Stateful:
    instances = 0

    def __init__(self):
        Stateful.instances += 1
        self.items = []

    @lite_test
    def check_first(self):
        self.items.append("first")
        assert_equals(1, len(self.items))

    @lite_test
    def check_second(self):
        self.items.append("second")
        assert_equals(1, len(self.items))
