"""Window, layout and rendering for albumplayer."""
