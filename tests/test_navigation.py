import random
import unittest

from twinpane.browser.navigation import NavigationState


def _assert_invariants(test, nav, count):
    if count == 0:
        test.assertEqual(nav.selected_index, 0)
    else:
        test.assertTrue(0 <= nav.selected_index < count, (nav, count))
    test.assertGreaterEqual(nav.scroll_offset, 0)
    test.assertLessEqual(nav.scroll_offset, nav.selected_index)
    test.assertLess(nav.selected_index, nav.scroll_offset + nav.viewport_height)


class NavigationStateTests(unittest.TestCase):
    def test_move_down_four_times_scrolls_viewport(self):
        nav = NavigationState('/tmp', viewport_height=3)

        for _ in range(4):
            nav.move_down(5)

        self.assertEqual(nav.selected_index, 4)
        self.assertEqual(nav.scroll_offset, 2)

    def test_move_down_stops_at_last_entry(self):
        nav = NavigationState('/tmp', viewport_height=10)
        for _ in range(5):
            nav.move_down(3)
        self.assertEqual(nav.selected_index, 2)

    def test_move_up_scrolls_back_into_view(self):
        nav = NavigationState('/tmp', selected_index=4, scroll_offset=4, viewport_height=3)

        nav.move_up()

        self.assertEqual(nav.selected_index, 3)
        self.assertEqual(nav.scroll_offset, 3)

    def test_move_up_at_top_is_noop(self):
        nav = NavigationState('/tmp', viewport_height=3)
        nav.move_up()
        self.assertEqual((nav.selected_index, nav.scroll_offset), (0, 0))

    def test_jump_bottom_selects_last_item(self):
        nav = NavigationState('/tmp', viewport_height=3)

        nav.jump_bottom(10)

        self.assertEqual(nav.selected_index, 9)
        self.assertEqual(nav.scroll_offset, 7)

    def test_jump_bottom_on_short_listing_keeps_scroll_zero(self):
        nav = NavigationState('/tmp', viewport_height=10)
        nav.jump_bottom(4)
        self.assertEqual((nav.selected_index, nav.scroll_offset), (3, 0))

    def test_jump_bottom_on_empty_listing(self):
        nav = NavigationState('/tmp', viewport_height=3)
        nav.jump_bottom(0)
        self.assertEqual((nav.selected_index, nav.scroll_offset), (0, 0))

    def test_jump_top_resets(self):
        nav = NavigationState('/tmp', selected_index=8, scroll_offset=6, viewport_height=3)
        nav.jump_top()
        self.assertEqual((nav.selected_index, nav.scroll_offset), (0, 0))

    def test_clamp_pulls_selection_into_shorter_listing(self):
        nav = NavigationState('/tmp', selected_index=9, scroll_offset=7, viewport_height=3)

        nav.clamp(4)

        self.assertEqual(nav.selected_index, 3)
        _assert_invariants(self, nav, 4)

    def test_clamp_on_empty_listing_floors_at_zero(self):
        nav = NavigationState('/tmp', selected_index=5, scroll_offset=3, viewport_height=3)
        nav.clamp(0)
        self.assertEqual((nav.selected_index, nav.scroll_offset), (0, 0))

    def test_resize_keeps_selection_visible(self):
        nav = NavigationState('/tmp', selected_index=9, scroll_offset=0, viewport_height=20)

        nav.resize(4, 12)

        self.assertEqual(nav.viewport_height, 4)
        self.assertEqual(nav.scroll_offset, 6)

    def test_resize_never_goes_below_one_row(self):
        nav = NavigationState('/tmp', viewport_height=5)
        nav.resize(0, 3)
        self.assertEqual(nav.viewport_height, 1)

    def test_random_moves_preserve_invariants(self):
        rng = random.Random(1234)
        for count in (0, 1, 2, 5, 17):
            nav = NavigationState('/tmp', viewport_height=rng.randint(1, 6))
            for _ in range(300):
                step = rng.choice(('up', 'down', 'top', 'bottom'))
                if step == 'up':
                    nav.move_up()
                elif step == 'down':
                    nav.move_down(count)
                elif step == 'top':
                    nav.jump_top()
                else:
                    nav.jump_bottom(count)
                nav.clamp(count)
                _assert_invariants(self, nav, count)

    def test_parent_path(self):
        self.assertEqual(NavigationState('/usr/local').parent_path(), '/usr')
        self.assertEqual(NavigationState('/usr').parent_path(), '/')
        self.assertIsNone(NavigationState('/').parent_path())


if __name__ == '__main__':
    unittest.main()
