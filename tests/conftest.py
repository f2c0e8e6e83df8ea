from httperror.status import TITLES

REGISTERED_CODES = [int(x) for x in TITLES]
CLIENT_CODES = [x for x in REGISTERED_CODES if x < 500]
SERVER_CODES = [x for x in REGISTERED_CODES if x >= 500]
UNREGISTERED_CODES = [419, 420, 427, 430, 432, 450, 452, 499, 509]
