"""Tests for the normalized-info view."""

from conftest import STORYBOARD_SPEC

from companion.youtube.video_info import build_storyboard_boards, build_video_info, normalize_format


class TestNormalizeFormat:
    """Tests for normalize_format."""

    def test_renames_fields(self, player_response):
        """Test that raw camelCase keys become snake_case."""
        fmt = normalize_format(player_response["streamingData"]["adaptiveFormats"][0])

        assert fmt["mime_type"] == 'video/mp4; codecs="avc1.640028"'
        assert fmt["quality_label"] == "1080p"
        assert fmt["content_length"] == "80000000"
        assert fmt["init_range"] == {"start": "0", "end": "740"}
        assert fmt["index_range"] == {"start": "741", "end": "1260"}
        assert fmt["color_info"] == {"primaries": "COLOR_PRIMARIES_BT709"}
        assert "mimeType" not in fmt

    def test_absent_fields_are_omitted(self):
        """Test that missing upstream fields stay missing."""
        assert normalize_format({"itag": 18}) == {"itag": 18}


class TestBuildStoryboardBoards:
    """Tests for build_storyboard_boards."""

    def test_no_spec(self):
        """Test that no spec gives no board list."""
        assert build_storyboard_boards(None) is None

    def test_every_level_is_a_board(self):
        """Test board derivation from a spec string."""
        result = build_storyboard_boards(STORYBOARD_SPEC)

        assert result["type"] == "PlayerStoryboardSpec"
        assert len(result["boards"]) == 4
        first = result["boards"][0]
        assert first["template_url"] == (
            "https://i.ytimg.com/sb/dQw4w9WgXcQ/storyboard3_L0/default.jpg?sqp=abc&sigh=rs$AAA"
        )
        assert first["thumbnail_width"] == 48
        assert first["storyboard_count"] == 1
        assert result["boards"][3]["storyboard_count"] == 7


class TestBuildVideoInfo:
    """Tests for build_video_info."""

    def test_full_response(self, player_response):
        """Test the view of a realistic response."""
        info = build_video_info(player_response)

        assert info.playability_status == {"status": "OK", "reason": None}
        assert info.basic_info["channel_id"] == "UCuAXFkgsw1L7xaCfnd5JJOw"
        assert len(info.streaming_data["formats"]) == 1
        assert len(info.streaming_data["adaptive_formats"]) == 2
        assert info.captions["caption_tracks"][0]["name"] == {"text": "English"}
        assert info.captions["caption_tracks"][1]["language_code"] == "de"
        assert len(info.storyboards["boards"]) == 4

    def test_empty_response(self):
        """Test that an empty response gives an empty view."""
        info = build_video_info({})

        assert info.playability_status == {"status": None, "reason": None}
        assert info.streaming_data is None
        assert info.captions is None
        assert info.storyboards is None

    def test_reason_from_error_screen(self):
        """Test that the reason falls back to the error screen text."""
        info = build_video_info({
            "playabilityStatus": {
                "status": "LOGIN_REQUIRED",
                "errorScreen": {
                    "playerErrorMessageRenderer": {
                        "reason": {"runs": [{"text": "Sign in to confirm your age"}]}
                    }
                },
            }
        })

        assert info.playability_status == {
            "status": "LOGIN_REQUIRED",
            "reason": "Sign in to confirm your age",
        }
