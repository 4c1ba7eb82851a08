FactorSet = list[int]

# RSA demo
RSA_P = 1013
RSA_Q = 1019
RSA_E = 3
RSA_MESSAGE = 51010

# Diffie-Hellman, generic search over a fixed 30-digit prime
DH_PRIME = 829790567063746890611494501103  # P - 1 factors over primes below 2000
DH_THRESHOLD = 15  # search starts right above this

# Private exponents shared by both exchanges
PRIVATE_A = 51015
PRIVATE_B = 51016

# Diffie-Hellman over a generated safe prime
SAFE_DIGITS_MIN = 51  # ~170 bits
SAFE_BITS_MIN = 130
GEN_START_MIN = 100
PRP_REPS = 30

LOG2_10 = 3.3219280948873626

# Strategy benchmark
BENCH_DIGITS = 12
BENCH_REPEATS = 5
