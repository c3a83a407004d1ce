"""
docker-ip-retrieval

Show the outbound public IP address and approximate location of Docker
containers, or list their published ports.
"""
