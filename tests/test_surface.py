"""Tests for Surface and the absent surface."""

import pytest
from term_grid import ABSENT, CellBuffer, MemoryBackend, Surface


def make_surface(width, height):
    """Create a full-screen surface on a fresh in-memory backend."""
    backend = MemoryBackend(width, height)
    return backend, Surface.fullscreen(backend)


class TestClip:
    """Tests for Surface.clip()."""

    def test_fullscreen_covers_backend(self):
        """Test that the root surface matches the backend size."""
        _, surface = make_surface(10, 4)
        assert (surface.x, surface.y, surface.width, surface.height) == (0, 0, 10, 4)

    @pytest.mark.parametrize('width,height', [(0, 0), (1, 1), (3, 2), (10, 4)])
    def test_out_of_bounds_is_absent(self, width, height):
        """Test negative offsets and oversized rectangles."""
        surface = Surface(CellBuffer(width, height), 0, 0, width, height)
        assert surface.clip(-1, 0, 1, 1) is ABSENT
        assert surface.clip(0, -1, 1, 1) is ABSENT
        assert surface.clip(0, 0, width + 1, 1) is ABSENT
        assert surface.clip(0, 0, 1, height + 1) is ABSENT
        assert surface.clip(0, 0, -1, 0) is ABSENT
        assert surface.clip(0, 0, 0, -1) is ABSENT

    def test_whole_surface_clip(self):
        """Test that clipping to the full extent succeeds."""
        _, surface = make_surface(10, 4)
        clip = surface.clip(0, 0, 10, 4)
        assert clip
        assert (clip.width, clip.height) == (10, 4)

    def test_clip_is_relative_to_origin(self):
        """Test that nested clips accumulate their offsets."""
        _, surface = make_surface(10, 4)
        clip = surface.clip(2, 1, 5, 2)
        inner = clip.clip(1, 1, 4, 1)
        assert (clip.x, clip.y) == (2, 1)
        assert (inner.x, inner.y, inner.width, inner.height) == (3, 2, 4, 1)

    def test_nested_clip_bounded_by_derived_rectangle(self):
        """Test that a clip cannot grow back to its parent's size."""
        _, surface = make_surface(10, 4)
        clip = surface.clip(2, 1, 5, 2)
        assert clip.clip(0, 0, 6, 1) is ABSENT
        assert clip.clip(0, 0, 5, 3) is ABSENT
        assert clip.clip(-1, 0, 1, 1) is ABSENT

    def test_empty_clip_at_edge(self):
        """Test that a zero-sized clip on the edge is still a surface."""
        _, surface = make_surface(10, 4)
        clip = surface.clip(10, 4, 0, 0)
        assert clip is not ABSENT
        assert clip.width == 0

    def test_clip_inherits_colours(self):
        """Test that a clip starts with its parent's colours."""
        _, surface = make_surface(10, 4)
        surface.set_foreground('red')
        surface.set_background(4)
        clip = surface.clip(1, 1, 2, 2)
        assert (clip.fg, clip.bg) == ('red', 4)
        assert (clip.dx, clip.dy) == (0, 0)


class TestPrint:
    """Tests for painting text."""

    def test_print_at_origin(self):
        """Test that text starts at the top-left cell."""
        backend, surface = make_surface(8, 2)
        surface.print('hello')
        assert backend.lines() == ['hello   ', '        ']
        assert (surface.dx, surface.dy) == (5, 0)

    def test_print_wraps(self):
        """Test that long text continues on the next row."""
        backend, surface = make_surface(4, 3)
        surface.print('abcdefghij')
        assert backend.lines() == ['abcd', 'efgh', 'ij  ']
        assert (surface.dx, surface.dy) == (2, 2)

    def test_print_truncates_at_bottom(self):
        """Test that text past the last row is dropped silently."""
        backend, surface = make_surface(4, 2)
        surface.print('abcdefghij')
        assert backend.lines() == ['abcd', 'efgh']

    def test_consecutive_prints_continue(self):
        """Test that print leaves the cursor after its text."""
        backend, surface = make_surface(6, 2)
        surface.print('ab')
        surface.print('cdef')
        surface.print('gh')
        assert backend.lines() == ['abcdef', 'gh    ']

    def test_println(self):
        """Test that println moves to the start of the next row."""
        backend, surface = make_surface(4, 2)
        surface.println('ab')
        surface.print('c')
        assert backend.lines() == ['ab  ', 'c   ']

    def test_println_after_full_row(self):
        """Test that println after exactly filling a row skips one row only."""
        backend, surface = make_surface(2, 3)
        surface.println('ab')
        surface.print('c')
        assert backend.lines() == ['ab', 'c ', '  ']

    def test_multibyte_characters(self):
        """Test that characters, not bytes, are counted."""
        backend, surface = make_surface(5, 1)
        surface.print('héllo')
        assert backend.lines() == ['héllo']

    def test_clipped_print_stays_inside(self):
        """Test that a clip cannot paint outside its rectangle."""
        backend, surface = make_surface(6, 3)
        surface.clip(1, 1, 3, 1).print('abcdefgh')
        assert backend.lines() == ['      ', ' abc  ', '      ']

    def test_zero_width_surface(self):
        """Test that printing into no width does nothing."""
        backend, surface = make_surface(4, 2)
        surface.clip(2, 0, 0, 2).print('abc')
        assert backend.lines() == ['    ', '    ']

    def test_colours_written_to_cells(self):
        """Test that painted cells carry the surface colours."""
        backend, surface = make_surface(4, 1)
        surface.set_foreground('red')
        surface.set_background(2)
        surface.print('x')
        cell = backend.cell_buffer()[0, 0]
        assert (cell.char, cell.fg, cell.bg) == ('x', 'red', 2)

    def test_colours_do_not_propagate_to_parent(self):
        """Test that a clip's colours are its own."""
        backend, surface = make_surface(4, 1)
        clip = surface.clip(2, 0, 2, 1)
        clip.set_foreground('red')
        clip.print('x')
        surface.print('y')
        buffer = backend.cell_buffer()
        assert buffer[0, 0].fg is None
        assert buffer[2, 0].fg == 'red'

    def test_move_to(self):
        """Test repositioning the cursor."""
        backend, surface = make_surface(4, 2)
        surface.move_to(2, 1)
        surface.print('z')
        assert backend.lines() == ['    ', '  z ']


class TestClear:
    """Tests for Surface.clear()."""

    def test_clear_fills_with_colours(self):
        """Test that clear paints blanks in the current colours."""
        backend, surface = make_surface(3, 2)
        surface.print('abcdef')
        surface.set_background(4)
        surface.clear()
        assert backend.lines() == ['   ', '   ']
        assert all(cell.bg == 4 for row in backend.cell_buffer().rows for cell in row)
        assert (surface.dx, surface.dy) == (0, 0)

    def test_clear_only_touches_clip(self):
        """Test that clearing a clip leaves the rest of the buffer alone."""
        backend, surface = make_surface(4, 3)
        surface.print('x' * 12)
        surface.clip(1, 1, 2, 1).clear()
        assert backend.lines() == ['xxxx', 'x  x', 'xxxx']


class TestAbsentSurface:
    """Tests for the absent surface."""

    def test_is_falsy_and_empty(self):
        """Test that the absent surface has no extent."""
        assert not ABSENT
        assert ABSENT.width == 0
        assert ABSENT.height == 0

    def test_clip_stays_absent(self):
        """Test that clipping nothing yields nothing."""
        assert ABSENT.clip(0, 0, 0, 0) is ABSENT

    def test_operations_are_noops(self):
        """Test that every operation is accepted and ignored."""
        ABSENT.set_foreground('red')
        ABSENT.set_background('blue')
        ABSENT.move_to(1, 1)
        ABSENT.clear()
        ABSENT.print('text')
        ABSENT.println('text')
        assert ABSENT.fg is None
        assert ABSENT.bg is None
