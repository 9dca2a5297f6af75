from tradernet_mcp.main import main


raise SystemExit(main())
