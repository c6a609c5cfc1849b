"""CDDA raw image protocol constants.

Single source of truth for sector layout and the WAV container layout.
Keep this file stable. Splitter and verifier must remain synchronized.
"""

# Sector layout: [PCM(2352) | Subcode(96)] = 2448 bytes
DATA_SIZE = 2352
SUBCODE_SIZE = 96
BLOCK_SIZE = DATA_SIZE + SUBCODE_SIZE

# Subcode channel P lives in the high bit of every subcode byte
SUBCODE_P = 1 << 7

# Red Book audio
SAMPLE_RATE = 44100
BITS_PER_SAMPLE = 16
NUM_CHANNELS = 2
BLOCK_ALIGN = NUM_CHANNELS * (BITS_PER_SAMPLE // 8)
BYTE_RATE = SAMPLE_RATE * BLOCK_ALIGN
FRAMES_PER_BLOCK = DATA_SIZE // BLOCK_ALIGN

# Header: [RIFF | size | WAVE | fmt  | 16 | fmt(16) | data | size] = 44 bytes
WAV_HEADER_FMT = "<4sI4s4sIHHIIHH4sI"
WAV_HEADER_LEN = 44
WAV_SUBCHUNK1_PCM = 16
WAV_FORMAT_PCM = 1

# RIFF sizes are u32; the chunk size field carries 36 extra bytes
MAX_DATA_SIZE = 0xFFFFFFFF - 36

# Output naming
TRACK_PREFIX = "track_"
TRACK_SUFFIX = ".wav"
