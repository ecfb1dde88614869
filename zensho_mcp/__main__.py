from zensho_mcp.server import main

main()
