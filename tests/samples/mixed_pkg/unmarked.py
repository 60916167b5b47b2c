from litetest import lite_test


class NotMarked:
    @lite_test
    def check_unmarked(self):
        pass

    def helper(self):
        pass
