from nocobase_mcp.main import main

main()
