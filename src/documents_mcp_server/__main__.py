from documents_mcp_server.main import main

raise SystemExit(main())
