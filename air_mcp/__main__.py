from air_mcp.server import main

main()
