""" Fund Connect: placement agents, investors, funds and messaging... """
