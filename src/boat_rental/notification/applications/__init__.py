from .notify_parties import notify_parties as notify_parties
