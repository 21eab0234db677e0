ZERO_AMOUNT = 0
