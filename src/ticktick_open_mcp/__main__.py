from ticktick_open_mcp.server import main

main()
