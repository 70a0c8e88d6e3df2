"""
Pytest configuration and fixtures for video-companion tests.

This module runs before any test imports, setting up the test environment.
Environment variables are explicitly set to ensure deterministic test behavior
regardless of external environment configuration.
"""

import copy
import os
from datetime import datetime, timezone

import pytest

# Routes are rate limited; keep the limit out of reach of the test suite
os.environ["RATE_LIMIT"] = "10000/minute"

# Plain URL localization unless a test opts into encryption explicitly
os.environ["ENCRYPT_QUERY_PARAMS"] = "false"
os.environ["PO_TOKEN_ENABLED"] = "false"
os.environ["BASE_PATH"] = ""

VIDEO_ID = "dQw4w9WgXcQ"

# Fixed "now" for assembler tests
FIXED_NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)

STORYBOARD_SPEC = (
    "https://i.ytimg.com/sb/dQw4w9WgXcQ/storyboard3_L$L/$N.jpg?sqp=abc"
    "|48#27#100#10#10#0#default#rs$AAA"
    "|80#45#50#10#10#2000#M$M#rs$BBB"
    "|160#90#50#5#5#2000#M$M#rs$CCC"
    "|320#180#60#3#3#2000#M$M#rs$DDD"
)

_PLAYER_RESPONSE = {
    "playabilityStatus": {"status": "OK", "playableInEmbed": True},
    "videoDetails": {
        "videoId": VIDEO_ID,
        "title": "Never Gonna Give You Up",
        "lengthSeconds": "212",
        "keywords": ["rick astley", "80s"],
        "channelId": "UCuAXFkgsw1L7xaCfnd5JJOw",
        "shortDescription": "Official video #RickAstley https://example.com/rick",
        "isLiveContent": False,
        "allowRatings": True,
        "viewCount": "1500000000",
        "author": "Rick Astley",
        "isPrivate": False,
        "isUnpluggedCorpus": False,
        "thumbnail": {
            "thumbnails": [
                {"url": "https://i.ytimg.com/vi/dQw4w9WgXcQ/default.jpg", "width": 120, "height": 90},
                {"url": "https://i.ytimg.com/vi/dQw4w9WgXcQ/hqdefault.jpg", "width": 480, "height": 360},
            ]
        },
    },
    "microformat": {
        "playerMicroformatRenderer": {
            "publishDate": "2024-05-01T12:00:00+00:00",
            "defaultLanguage": "en",
        }
    },
    "streamingData": {
        "expiresInSeconds": "21540",
        "formats": [
            {
                "itag": 18,
                "url": "https://rr1---sn-abc.googlevideo.com/videoplayback?expire=1&itag=18&ip=1.2.3.4&pot=secret-token",
                "mimeType": 'video/mp4; codecs="avc1.42001E, mp4a.40.2"',
                "bitrate": 503000,
                "width": 640,
                "height": 360,
                "lastModified": "1700000000000000",
                "contentLength": "13000000",
                "quality": "medium",
                "fps": 25,
                "qualityLabel": "360p",
                "projectionType": "RECTANGULAR",
                "averageBitrate": 500000,
                "audioQuality": "AUDIO_QUALITY_LOW",
                "approxDurationMs": "212000",
                "audioSampleRate": "44100",
                "audioChannels": 2,
            }
        ],
        "adaptiveFormats": [
            {
                "itag": 137,
                "url": "https://rr1---sn-abc.googlevideo.com/videoplayback?expire=1&itag=137&ip=1.2.3.4",
                "mimeType": 'video/mp4; codecs="avc1.640028"',
                "bitrate": 4500000,
                "width": 1920,
                "height": 1080,
                "initRange": {"start": "0", "end": "740"},
                "indexRange": {"start": "741", "end": "1260"},
                "lastModified": "1700000000000001",
                "contentLength": "80000000",
                "quality": "hd1080",
                "fps": 25,
                "qualityLabel": "1080p",
                "projectionType": "RECTANGULAR",
                "averageBitrate": 3000000,
                "colorInfo": {"primaries": "COLOR_PRIMARIES_BT709"},
                "approxDurationMs": "212000",
            },
            {
                "itag": 251,
                "url": "https://rr1---sn-abc.googlevideo.com/videoplayback?expire=1&itag=251",
                "mimeType": 'audio/webm; codecs="opus"',
                "bitrate": 140000,
                "initRange": {"start": "0", "end": "265"},
                "indexRange": {"start": "266", "end": "620"},
                "lastModified": "1700000000000002",
                "contentLength": "3400000",
                "quality": "tiny",
                "projectionType": "RECTANGULAR",
                "averageBitrate": 130000,
                "highReplication": True,
                "audioQuality": "AUDIO_QUALITY_MEDIUM",
                "approxDurationMs": "212000",
                "audioSampleRate": "48000",
                "audioChannels": 2,
                "loudnessDb": 0,
            },
        ],
    },
    "captions": {
        "playerCaptionsTracklistRenderer": {
            "captionTracks": [
                {
                    "baseUrl": "https://www.youtube.com/api/timedtext?v=dQw4w9WgXcQ&lang=en",
                    "name": {"simpleText": "English"},
                    "vssId": ".en",
                    "languageCode": "en",
                    "isTranslatable": True,
                },
                {
                    "baseUrl": "https://www.youtube.com/api/timedtext?v=dQw4w9WgXcQ&lang=de&kind=asr",
                    "name": {"simpleText": "German (auto-generated)"},
                    "vssId": "a.de",
                    "languageCode": "de",
                },
                {
                    "baseUrl": "https://www.youtube.com/api/timedtext?v=dQw4w9WgXcQ&lang=en&kind=asr",
                    "name": {"simpleText": "English (auto-generated)"},
                    "vssId": "a.en",
                    "languageCode": "en",
                    "isTranslatable": False,
                },
            ]
        }
    },
    "storyboards": {
        "playerStoryboardSpecRenderer": {"spec": STORYBOARD_SPEC}
    },
}


@pytest.fixture
def player_response():
    """A fresh copy of a realistic raw player response."""
    return copy.deepcopy(_PLAYER_RESPONSE)
