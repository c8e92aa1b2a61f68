"""
Subject Tables
Static label tables shared by the classifier and the renderer.

Declaration order matters: it is the tie-break order of the classifier.
"""

from types import MappingProxyType

RUSTLINGS_PLAYLIST = "PLI9i5fpXEEc6g4tZJsnOPKVjnGkOCMKmm"
ICE_REPOS_PLAYLIST = "PLI9i5fpXEEc40_5gjSO--whmr_5Yp-aJN"
ECHO_PLAYLIST = "PLI9i5fpXEEc6GHl9wyZUWm9UwtO-1Qj7d"
SEGMENTED_CLIENT_PLAYLIST = "PLI9i5fpXEEc6_o2Xy0ozg_hrO4FgswkGG"
RUST_GA_PLAYLIST = "PLI9i5fpXEEc7E8W7wkWYuzXgvPAv8Emkl"

SUBJECT_KEYWORDS = MappingProxyType({
    "rustlings": ("Rustlings", "exercises", "learn"),
    "ice-repos": ("ice-repos", "archiv", "repositor"),
    "echo": ("echo", "server", "thread"),
    "segmented": ("segmented", "lab", "packet"),
    "rust-ga": ("rust-ga", "population", "bitstring"),
})

PLAYLIST_CODES = MappingProxyType({
    "rustlings": RUSTLINGS_PLAYLIST,
    "ice-repos": ICE_REPOS_PLAYLIST,
    "echo": ECHO_PLAYLIST,
    "segmented": SEGMENTED_CLIENT_PLAYLIST,
    "rust-ga": RUST_GA_PLAYLIST,
})
