from helius_mcp.stdio import run

if __name__ == "__main__":
    run()
